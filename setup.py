import setuptools

from tinypulse import __version__

with open("README.md", "r") as fh:
    long_description = fh.read()

INSTALL_REQUIRES = [
    'colorama',      # Makes ANSI escape character sequences work under MS Windows.
]

setuptools.setup(
    name="tinypulse",
    version=__version__,
    author="tinypulse contributors",
    description="Python module to convert Broadlink IR/RF commands to and from pulse arrays",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=("tests",)),
    install_requires=INSTALL_REQUIRES,
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
