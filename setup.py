from setuptools import find_packages, setup
import codecs
import os.path

def read(rel_path):
    here = os.path.abspath(os.path.dirname(__file__))
    with codecs.open(os.path.join(here, rel_path), 'r') as fp:
        return fp.read()

def get_version(rel_path):
    for line in read(rel_path).splitlines():
        if line.startswith('__version__'):
            delim = '"' if '"' in line else "'"
            return line.split(delim)[1]
    else:
        raise RuntimeError("Unable to find version string.")

with open("README.md", "r") as readme_file:
    long_description = readme_file.read()

setup(
    name='cpsudoku',
    version=get_version("cpsudoku/__init__.py"),
    description='A numpy-based constraint propagation and search solver for sudoku puzzles',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["cpsudoku", "cpsudoku.*"]),
    include_package_data=True,
    zip_safe=False,
    install_requires=[
        'ortools>=9.0',
        'numpy>=1.5',
    ],
    extras_require={
        "test": ["pytest", "pytest-timeout"],
    },
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8'
)
