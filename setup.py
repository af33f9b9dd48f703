# setup.py
from setuptools import setup, find_packages

setup(
    name="spiderseek",
    version="0.1.0",
    description="Post-build injector of the Spiderseek analytics script into static HTML output",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"spiderseek": ["templates/*.j2"]},
    install_requires=[
        "click>=8.1",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "Jinja2>=3.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["spiderseek=spiderseek.cli:cli"],
    },
    python_requires=">=3.11",
)
