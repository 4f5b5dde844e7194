# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="rotating-log-writer",
    version="0.1.0",
    description="Log writer appending host framework log records to a daily rotated file",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["rotating_log_writer*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
