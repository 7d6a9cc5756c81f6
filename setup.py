from setuptools import setup, find_packages

setup(
    name="geocoordinate",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.21.0",
        "pandas>=1.3.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'geocoordinate=geocoordinate.cli:main',
        ],
    },
    python_requires=">=3.8",
)
