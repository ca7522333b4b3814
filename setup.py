""" ecprim build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecprim

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecprim.name,
    version=ecprim.__version__,
    license=ecprim.__license__,
    author=ecprim.__author__,
    author_email=ecprim.__author_email__,
    description="Elliptic curve point arithmetic over prime and binary fields",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"ecprim": ["data/*.json"]},
    include_package_data=True,
    install_requires=["dataclasses-json"],
    extras_require={"test": ["pytest"]},
    keywords=(
        "cryptography elliptic-curves binary-fields GF(2^m) "
        "point-addition scalar-multiplication SEC2 NIST"
    ),
    python_requires=">=3.8",
    classifiers=[
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
