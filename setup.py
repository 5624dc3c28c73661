from setuptools import setup, find_packages

setup(
    name="sudoku-logic",
    version="1.0.0",
    description="Sudoku solver by constraint propagation, without search",
    author="robomotic",
    packages=find_packages(include=["sudoku_logic", "sudoku_logic.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "sudoku-logic=sudoku_logic.cli:main",
        ],
    },
)
