# setup.py
from setuptools import setup, find_packages

setup(
    name="debugkit",
    version="0.1.0",
    description="Taggable console/platform logging, log callbacks and assertions for application code",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
