from setuptools import find_packages, setup

setup(
    name="fiso",
    version="0.1.0",
    description="Directory inventory: counts, sizes, extensions and old files",
    packages=find_packages(include=["fiso", "fiso.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # Command-line interface
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output schemas
        "jinja2",  # Template rendering for CLI outputs
        "PyYAML",  # YAML output for --display yaml
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            "fiso=fiso.cli:main",
        ],
    },
)
