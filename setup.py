# setup.py
from setuptools import setup, find_packages

setup(
    name="minilisp",
    version="0.1.0",
    description="A minimal S-expression interpreter with a language server",
    packages=find_packages(include=["minilisp", "minilisp.*", "minilisp_lsp", "minilisp_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "minilisp=minilisp.__main__:main",
            "minilisp-ls=minilisp_lsp.server:main",
        ],
    },
    zip_safe=False,
)
