from setuptools import find_packages, setup

setup(
    name="tml",
    version="0.1.0",
    description="Make a symbolic link, creating parent directories as needed",
    author="Michael Leandersson",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # Command line parsing
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output schemas
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            "tml=tml.cli:main",
        ],
    },
)
