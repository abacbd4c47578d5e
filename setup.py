# setup.py
from setuptools import setup, find_packages

setup(
    name="treeshell",
    version="0.1.0",
    description="Interactive shell over a simplified composite view of the filesystem",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={
        "treeshell": ["interface/locales/*.json"],
    },
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'treeshell=treeshell.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
