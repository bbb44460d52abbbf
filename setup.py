""" eclib build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import eclib

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=eclib.name,
    version=eclib.__version__,
    license=eclib.__license__,
    author=eclib.__author__,
    author_email=eclib.__author_email__,
    description="Short-Weierstrass elliptic curve arithmetic over prime fields",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"eclib": ["data/*.json"]},
    include_package_data=True,
    install_requires=[],
    extras_require={
        "secp256k1": ["btclib_libsecp256k1"],
        "test": ["pytest"],
    },
    keywords="elliptic-curves secp256k1 secp256r1 SEC point-encoding",
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
