from setuptools import setup, find_namespace_packages

setup(
    name="carrilbici",
    version="0.1.0",
    packages=find_namespace_packages(include=("carrilbici", "carrilbici.*")),
    package_data={"carrilbici.inventory": ["*.json"]},
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2",
        "PyYAML",
        "jsonschema",
        "structlog",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'carrilbici = carrilbici.cli.carrilbici_cli:main',
        ],
    },
)
