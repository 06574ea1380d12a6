from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="subsetgen",
    version="0.1.0",
    description="Lazy power-set enumeration for brute-force and FPT algorithms.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "examples")),
    package_data={"subsetgen.schemas": ["problem.json"]},
    python_requires=">=3.10",
    install_requires=["numpy", "PyYAML", "jsonschema"],
    extras_require={"test": ["pytest"]},
    tests_require=["pytest"],
    entry_points={"console_scripts": ["subsetgen=subsetgen.cli:main"]},
)
