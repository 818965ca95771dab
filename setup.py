"""
Setup script for termlive live terminal rendering.
"""

from setuptools import setup, find_packages

setup(
    name="termlive",
    version="0.1.0",
    description="Thread-safe live progress bars, spinners and status blocks for the terminal",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="termlive Team",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "rich>=13.0.0",
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "termlive-demo=termlive.demo:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Environment :: Console",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
