# setup.py
from setuptools import setup, find_packages

setup(
    name="site_word_scanner",
    version="1.0.1",
    description="Explore websites and list all keyword occurrences",
    packages=find_packages(include=["site_word_scanner", "site_word_scanner.*"]),
    install_requires=[
        "aiohttp>=3.10",
        "beautifulsoup4>=4.12",
        "click>=8.2",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "site-word-scanner=site_word_scanner.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
