from setuptools import setup, find_packages

setup(
    name="connect4_engine",
    version="0.1.0",
    description="Connect Four rules, heuristic evaluation, alpha-beta search and tiered AI",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "connect4-engine=connect4_engine.cli:main",
        ],
    },
)
