from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="hd-wallet",
    version="0.1.0",
    author="Your Name",
    description="Deterministic Solana and Ethereum wallets from a single BIP39 mnemonic",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "venv"]),
    python_requires=">=3.8",
    install_requires=[
        "python-dotenv>=1.0.0",
        "mnemonic>=0.20",
        "eth-account>=0.9.0",
        "PyNaCl>=1.5.0",
        "base58>=2.1.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "hd-wallet=hd_wallet.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
