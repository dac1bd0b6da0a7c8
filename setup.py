from setuptools import setup, find_packages

setup(
    name="clock-duration",
    version="1.0",
    description="Calcola la durata tra due orari in formato 12 ore (AM/PM)",
    author="Valerio Galano",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "clock-duration=clock_duration.cli:main",
        ],
    },
)
