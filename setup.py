from setuptools import setup, find_packages

# Read requirements
with open("requirements.txt") as f:
    requirements = f.read().splitlines()

setup(
    name="git-subscribe",
    version="0.1",
    packages=find_packages(include=["gitsubscribe", "gitsubscribe.*"]),
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "git-subscribe=gitsubscribe.main:main",
        ],
    },
    python_requires=">=3.10",
    author="kerstop",
    description="Keep a list of local git repositories to keep an eye on",
)
