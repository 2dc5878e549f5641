from setuptools import setup, find_packages
import os

install_requires = ["lark>=1.1", "pydantic>=2"]

# Define optional dependencies for development and specific features
extras_require = {
    "dev": ["pytest", "pygls>=2.0", "lsprotocol"],
    "lsp": ["pygls>=2.0", "lsprotocol"],  # Language Server Protocol support
}

setup(
    name="qbdev-toolkit",
    version="1.0.0",
    packages=find_packages(where=".", exclude=["tests", "tests.*"]),
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "qbdev = qbdev.cli:main",
            "qbdev-lsp = qbdev.server:main",
        ],
    },
    include_package_data=True,
    package_data={"qbdev.validation": ["*.lark"]},
    python_requires=">=3.9",
    description="Validation and automation tooling for QB64PE BASIC programs.",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
