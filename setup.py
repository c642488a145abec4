from setuptools import setup, find_packages

setup(
    name="wreck",
    version="0.1.0",
    description="Complete tic-tac-toe tablebase with an interactive shell",
    packages=find_packages(include=["game", "evaluation", "tablebase"]),
    py_modules=["config", "wreck"],
    python_requires=">=3.8",
    install_requires=[
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "wreck=wreck:main",
        ],
    },
)
