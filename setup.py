from setuptools import setup, find_namespace_packages  # type: ignore

setup(
    name="chanperms",
    version="0.1.0",
    description="guild channel model with permission overwrite resolution",
    python_requires=">=3.10",
    packages=find_namespace_packages(include=["chanperms*"]),
    package_data={"chanperms": ["py.typed"]},
    install_requires=["hikari", "python-dotenv"],
    extras_require={"test": ["pytest", "pytest-asyncio"]},
)
