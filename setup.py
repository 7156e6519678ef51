from setuptools import find_packages, setup

# Define core requirements
core_requirements = [
    "nltk>=3.8",
    "pydantic>=2.0",
    "typer>=0.9.0",
]

# Define development requirements
dev_requirements = [
    "pytest>=7.3.1",
]

setup(
    name="wnquery",
    version="0.1.0",
    packages=find_packages(include=["wnquery", "wnquery.*"]),
    install_requires=core_requirements,
    extras_require={
        "dev": dev_requirements,
        "test": dev_requirements,
    },
    entry_points={
        "console_scripts": [
            "wnquery=wnquery.cli:app",
        ],
    },
    python_requires=">=3.9",
    description="Lemma, synset and morphology lookups over a WordNet database, returned as JSON envelopes",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
