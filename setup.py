# setup.py
from setuptools import setup, find_packages

setup(
    name="egg",
    version="0.1.0",
    description="Egg: a small expression language with a recursive-descent reader and tree-walking evaluator",
    packages=find_packages(include=["egg", "egg.*", "egg_lsp", "egg_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.0,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
