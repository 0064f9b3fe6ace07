from setuptools import setup, find_packages

setup(
    name="bitsudoku",
    version="1.0.0",
    description="Bitmask backtracking solver and unique-puzzle generator for 9x9 sudoku",
    author="bitsudoku contributors",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.24.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ]
    },
)
