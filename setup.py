from setuptools import setup, find_packages

setup(
    name="code_evolve",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "code-evolve=code_evolve.cli:main",
        ],
    },
    description="Parse and apply SEARCH/REPLACE code suggestions from AI responses.",
)
