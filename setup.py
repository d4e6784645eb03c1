from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="tripgraph",
    version="0.1.0",
    author="tripgraph contributors",
    description="Route, trip-count and shortest-distance queries over small weighted directed graphs.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*", "examples")),
    package_data={"tripgraph.schemas": ["*.json"]},
    python_requires=">=3.10",
    install_requires=["networkx", "PyYAML", "jsonschema>=4.18"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["tripgraph=tripgraph.cli:main"]},
)
