""" cryptomath build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import cryptomath

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=cryptomath.name,
    version=cryptomath.__version__,
    license=cryptomath.__license__,
    author=cryptomath.__author__,
    author_email=cryptomath.__author_email__,
    description="Elliptic curve point arithmetic over prime finite fields",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    # install_requires=[],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "myst_parser", "sphinx_rtd_theme"],
    },
    keywords="cryptography elliptic-curves finite-fields secp256k1",
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
