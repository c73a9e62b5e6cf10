from setuptools import find_packages, setup

setup(
    name="calloutline",
    version="0.1.0",
    description="Callout outline - chat callouts as outline headings for Obsidian vaults",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output schemas
        "typer<0.26",  # CLI (0.26+ vendors click; code uses click context)
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output and frontmatter
        "watchdog",  # File system monitoring
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "calloutline=calloutline.cli:main",
        ],
    },
)
