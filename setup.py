from setuptools import find_packages, setup

setup(
    name="pathguard",
    version="0.1.0",
    packages=find_packages(include=["pathguard", "pathguard.*"]),
    install_requires=[line for line in open("requirements-core.txt").read().splitlines() if line],
    extras_require={
        "test": [line for line in open("requirements-test.txt").read().splitlines() if line],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "pathguard=pathguard.cli:main",
        ],
    },
)
