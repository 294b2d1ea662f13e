"""
Setup.py for HexDump.
"""

import ast
import os

from setuptools import setup


INSTALL_REQUIREMENTS = []
TEST_REQUIREMENTS = [
    "pytest",
    "flake8>=3.7.9",
]


ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
CORE_PATH = os.path.join(ROOT_DIR, "hexdump", "core.py")


def get_hexdump_version(corepath):
    """
    Find and return the current HexDump version.
    :param corepath: path to the 'core.py' file of the hexdump package
    :type corepath: str
    :return: the HexDump version defined in the corepath
    :rtype: str
    """
    with open(corepath, "r") as fin:
        for line in fin:
            if line.startswith("__version__"):
                version = ast.literal_eval(line.split("=")[1].strip())
                return version
    raise Exception("Could not find HexDump version in file '{f}'".format(f=corepath))


setup(
    name="HexDump",
    version=get_hexdump_version(CORE_PATH),
    description="Print the bytes of a file as paired hexadecimal digits",
    packages=[
        "hexdump",
        "hexdump.bin",
        "hexdump.lib",
    ],
    scripts=["launch_hexdump.py"],
    zip_safe=False,
    python_requires=">=3.6",
    install_requires=INSTALL_REQUIREMENTS,
    extras_require={
        "testing": TEST_REQUIREMENTS,
    },
)
