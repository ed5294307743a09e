from setuptools import setup, find_packages

setup(
    name="nightscan",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={"nightscan": ["config.yaml"]},
    install_requires=[
        "click>=8.0",
        "requests>=2.25",
        "urllib3>=1.26",
        "python-dotenv>=1.0",
        "rich>=13.0",
        "python-dateutil>=2.8",
        "tenacity>=8.2.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "responses>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "nightscan=nightscan.cli.app:cli",
        ],
    },
    python_requires=">=3.10",
)
