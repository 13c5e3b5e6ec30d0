import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="npm-score",
    version="0.2.0",
    author="npm-score developers",
    description="Fetch, save and compare npms.io scores of npm packages",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["npm_score.tests"]),
    entry_points={
        "console_scripts": [
            "npm-score = npm_score.tools.score:main",
            "npm-score-config = npm_score.tools.config:main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
    install_requires=[
        "rich",
        "rich-argparse",
        "argparse-with-config",
        "dotnest",
        "pyyaml",
        "httpx",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
