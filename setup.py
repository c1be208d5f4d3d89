# setup.py
from setuptools import setup, find_packages

setup(
    name="include-folder",
    version="0.1.0",
    description="Build-time generator of module declarations that mirror a source directory tree",
    author="include-folder contributors",
    package_dir={"": "src"},
    packages=find_packages(where="src"),  # Finds the 'include_folder' package under src/
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'include-folder=include_folder.main:main',  # CLI entry point
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
