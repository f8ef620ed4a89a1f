import re

import setuptools

# Read the version without importing the package (its dependencies may not be installed yet)
with open("pylivebox/__init__.py", "r") as fh:
    version_tuple = re.search(r"^version_tuple = \((\d+), (\d+), (\d+)\)", fh.read(), re.M).groups()
__version__ = '.'.join(version_tuple)

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pylivebox",
    version=__version__,
    author="pyLivebox contributors",
    description="Python module to access Livebox and compatible home routers through their capability API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["*.tests", "*.tests.*"]),
    python_requires='>=3.9',
    install_requires=[
        'requests',
        'urllib3',
        'python-dotenv',
        'python-dateutil',
        'pydantic>=2',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['pylivebox=pylivebox.__main__:main'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
