#!/usr/bin/env python3

from setuptools import setup

setup(
    name="id3hdr",
    version="0.1.0",
    author="Karoly Lorentey",
    author_email="karoly@lorentey.hu",
    packages=["id3hdr"],
    python_requires=">=3.6",
    license="BSD",
    description="ID3v2 tag and frame header codec in pure Python 3",
    long_description="""
Decodes and encodes the fixed 10-byte ID3v2 tag header and the ID3v2.4
frame header, including the syncsafe integers used for their size
fields.  Malformed headers are reported as precise, typed exceptions;
frame bodies are left to the caller.
""",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Multimedia :: Sound/Audio"
        ],
    )
