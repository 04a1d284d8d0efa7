""" ecclab build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecclab

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecclab.name,
    version=ecclab.__version__,
    license=ecclab.__license__,
    author=ecclab.__author__,
    author_email=ecclab.__author_email__,
    description="A didactical library for elliptic curve Diffie-Hellman and ECIES",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"ecclab": ["data/*.json"]},
    include_package_data=True,
    install_requires=["dataclasses_json"],
    extras_require={"test": ["pytest"]},
    keywords=(
        "elliptic-curves finite-fields diffie-hellman ecdh ecies "
        "stream-cipher education"
    ),
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
