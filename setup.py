"""
Setup script for PDF Worker.

This script configures the package for installation via pip.
Supports both development and production installations.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README for long description
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding='utf-8')

setup(
    name="pdf-worker",
    version="1.0.0",
    description="Batch PDF editing tasks (merge, rotate, page selection, watermarking, protection) run off the caller's thread",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="PDF Worker Contributors",
    author_email="",
    packages=find_packages(include=["pdf_worker", "pdf_worker.*"]),
    install_requires=[
        "pypdf>=3.10.0",
        "reportlab>=3.6.0",
        "click>=8.0.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pdf-worker=pdf_worker.cli:cli",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: End Users/Desktop",
        "Intended Audience :: Developers",
        "Topic :: Office/Business",
        "Topic :: Utilities",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
    keywords="pdf merge rotate watermark encrypt pages ranges reorder metadata worker",
    license="MIT",
    include_package_data=True,
    zip_safe=False,
)
