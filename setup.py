# imports
import pathlib
import setuptools

# read version tag
version = None
version_path = pathlib.Path(__file__).parent / "ardatatransfer" / "version.py"
with open(version_path, "r") as version_file:
    for line in version_file.readlines():
        if line.startswith("__version__"):
            version = line.strip().split("=")[-1].strip().strip('"')
if not version:
    raise RuntimeError("ERROR: Failed to find version tag!")

# read the README to get the description
readme_path = pathlib.Path(__file__).parent / "README.md"
with open(readme_path, "r") as readme:
    long_description = readme.read()

setupkwargs = dict(
    name="ardatatransfer",
    packages=setuptools.find_packages(include=["ardatatransfer*"]),
    include_package_data=True,
    version=version,
    description=(
        "Python bindings for the enums of the ARDataTransfer native data transfer library"
    ),
    long_description=long_description,
    long_description_content_type="text/markdown",
    entry_points={
        "console_scripts": [
            "DescribeResumeFlag=ardatatransfer.data_transfer.resume_flag_describer:main",
        ],
    },
    python_requires=">=3.10",
    install_requires=[
        "openmsitoolbox>=1.2.4",
    ],
    extras_require={
        "test": [
            "black",
            "packaging",
            "pyflakes>=3.0.1",
            "pylint>=2.16.3",
            "unittest-xml-reporting",
        ],
        "dev": [
            "twine",
        ],
    },
    keywords=[
        "data_transfer",
        "native_bindings",
        "enums",
    ],
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)

setupkwargs["extras_require"]["all"] = sum(setupkwargs["extras_require"].values(), [])

setuptools.setup(**setupkwargs)
