from setuptools import setup, find_packages

setup(
    name="cfb-rankings",
    version="0.1.0",
    description="Resume, schedule-strength and efficiency driven college football rankings",
    author="cfb-rankings contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.22.4",
        "pandas>=1.5.3",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "cfb-rankings=cfb_rankings.main:main",
        ],
    },
)
