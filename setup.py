from setuptools import setup, find_packages

setup(
    name="categorical",
    version="0.1.0",
    description="Categorical probability distributions with pluggable deduplication backends",
    packages=find_packages(exclude=["*.tests", "*.tests.*"]),
    install_requires=[
        "numpy>=1.24.0",
        "python-dotenv>=1.0.0",
    ],
    python_requires=">=3.8",
)
