"""A setuptools based setup module
"""
import setuptools
import re

START_TAG=r"^\s*\<\!--.*exclude\s+package.*--\>\s*$"
END_TAG=r"^\s*\<\!--.*end\s+exclude\s+package.*--\>\s*$"

with open("README.md", "r") as fh:
    # exclude lines from readme that dont apply to publication in package
    # for example navigation bar in Readme refers to github relative paths
    long_description = fh.read()
    modified_description_lines = []
    marked = False

    for line in long_description.split("\n"):
        if re.match(START_TAG, line) or re.match(END_TAG, line):
            marked = True
        if not marked:
            modified_description_lines.append(line)
        if  re.match(END_TAG, line):
            marked = False

    long_description = "\n".join(modified_description_lines)

setuptools.setup(
    name="valuegen",
    version="0.1.0",
    author="The valuegen authors",
    description="Random test value and test object generators",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=['valuegen'],
    package_data={
        "valuegen": ["resources/people/*.txt", "resources/places/*.txt"],
    },
    include_package_data=True,
    install_requires=[
        "numpy>=1.22",
        "pandas>=1.5",
    ],
    extras_require={
        "test": ["pytest"],
    },
    license="Apache License 2.0",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Testing",
        "Intended Audience :: Developers"
    ],
    python_requires='>=3.10',
)
