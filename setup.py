# setup.py
from setuptools import setup, find_packages

setup(
    name="paren",
    version="0.1.0",
    description="Parser and tree-walking evaluator for a small S-expression language",
    packages=find_packages(include=["paren", "paren.*", "paren_lsp", "paren_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": ["pytest>=7", "hypothesis>=6.84"],
    },
    entry_points={
        "console_scripts": [
            "paren=paren.__main__:main",
            "paren-ls=paren_lsp.server:main",
        ],
    },
    zip_safe=False,
)
