# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="termtree",
    version="1.0.0",
    description="Rebuild directory trees from cd/ls terminal transcripts and report their sizes",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["termtree", "termtree.*"]),
    python_requires=">=3.9",
    install_requires=[
        "requests",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'termtree=termtree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
