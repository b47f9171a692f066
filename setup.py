# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="assetbridge",
    version="0.1.0",
    description="Path mapping and generated-asset pruning for static files in build pipelines",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["assetbridge*"]),
    python_requires=">=3.8",
    install_requires=[
        "wcmatch>=8.4",  # Globstar, brace and extglob matching
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
