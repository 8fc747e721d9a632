from setuptools import find_packages, setup

if __name__ == "__main__":
    setup(
        name="nostrseed",
        version="0.2.1",
        description="Nostr seed phrase keys, NIP-19 encoding, event signing and NIP-26 delegation",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.9",
        install_requires=["mnemonic>=0.20"],
        extras_require={"test": ["pytest>=7"]},
    )
