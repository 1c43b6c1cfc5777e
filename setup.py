#!/usr/bin/env python3
"""
micro-vdom Setup
"""

from setuptools import setup, find_packages

# Read long description from README.md
with open('README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name="micro-vdom",
    version="1.0.0",
    description="A minimal DOM-like HTML tree builder and serializer",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    include_package_data=True,
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
            "beautifulsoup4",
            "html5lib",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Text Processing :: Markup :: HTML",
    ],
    keywords="html, dom, builder, renderer",
)
