#!/usr/bin/env python3
"""
Meeteeor Python SDK
Signed client for the Meeteeor payment service API
"""

from setuptools import setup, find_packages

# Read the README file for long description
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Read requirements from requirements.txt
with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

# Read development requirements
with open("requirements-dev.txt", "r", encoding="utf-8") as fh:
    dev_requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="meeteeor-python-sdk",
    version="3.2.0",
    author="Meeteeor Team",
    author_email="sdk@meeteeor.com",
    description="Meeteeor Python SDK for the payment service API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/meeteeor/python-sdk",
    project_urls={
        "Bug Tracker": "https://github.com/meeteeor/python-sdk/issues",
        "Source Code": "https://github.com/meeteeor/python-sdk",
    },
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Office/Business :: Financial",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={
        "dev": dev_requirements,
        "httpx": ["httpx>=0.24.0"],
        "test": ["pytest>=7.0.0", "pytest-cov>=4.0.0", "httpx>=0.24.0"],
    },
    keywords=[
        "meeteeor",
        "payments",
        "api-client",
        "hmac",
        "sdk",
    ],
    include_package_data=True,
    package_data={
        "": ["*.md", "*.txt"],
    },
    entry_points={
        "console_scripts": [
            "meeteeor-cli=meeteeor_sdk.cli:main",
        ],
    },
)
