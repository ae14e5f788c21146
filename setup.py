from setuptools import setup, find_packages
from pathlib import Path

# Read the long description from the README
long_description = Path(__file__).parent.joinpath("README.md").read_text(encoding="utf-8")

setup(
    name='ca-extractor',
    version='1.0.0',
    description='Extract CA certificates from eIDAS Trusted Lists',
    long_description=long_description,
    long_description_content_type='text/markdown',

    packages=find_packages(exclude=["tests", "tests.*"]),

    # Runtime dependencies
    install_requires=[
        'cryptography>=42.0',
        'requests>=2.25',
        'urllib3>=1.26',
        'lxml>=4.9',
        'toml>=0.10.0',
        'colorama>=0.4.6',
    ],
    # Optional dependencies for development
    extras_require={
        'dev': [
            'pytest>=7.0',
            'flake8',
        ],
    },

    # Define console entry point for the CLI
    entry_points={
        'console_scripts': [
            'ca-extractor=ca_extractor.cli:main',
        ],
    },

    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.8',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
