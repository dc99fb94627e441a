import re
from os.path import abspath, dirname, join

from setuptools import find_packages, setup

CURDIR = dirname(abspath(__file__))

with open(join(CURDIR, "README.rst"), encoding="utf-8") as fh:
    long_description = fh.read()

with open(join(CURDIR, "src", "SelectListLibrary", "__init__.py"), encoding="utf-8") as f:
    VERSION = re.search('__version__ = "(.*)"', f.read()).group(1)

setup(
    name="robotframework-selectlistlibrary",
    version=VERSION,
    description="Select list keywords for Robot Framework on top of Selenium WebDriver",
    long_description_content_type="text/x-rst",
    long_description=long_description,
    package_dir={"": "src"},
    packages=find_packages("src"),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Testing",
        "Topic :: Software Development :: Testing :: Acceptance",
        "Framework :: Robot Framework",
        "Framework :: Robot Framework :: Library",
    ],
    python_requires=">=3.8",
    install_requires=[
        "robotframework >= 5.0",
        "robotframework-pythonlibcore >= 4.0",
        "selenium >= 4.3",
    ],
    extras_require={
        "seleniumlibrary": ["robotframework-seleniumlibrary >= 6.0"],
        "test": ["pytest >= 7.0"],
    },
)
