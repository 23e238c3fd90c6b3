"""Setup configuration for pdf-page-images package."""

from setuptools import setup, find_packages
import os

# Read README if available (may not exist during docker build)
long_description = "PDF Page Images Tool"
if os.path.isfile("README.md"):
    with open("README.md", "r", encoding="utf-8") as fh:
        long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [
        line.strip() for line in fh
        if line.strip() and not line.strip().startswith("#")
    ]

setup(
    name="pdf-page-images",
    version="1.0.0",
    description="Extract the embedded images of selected document pages as PNG files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Topic :: Multimedia :: Graphics :: Graphics Conversion",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Programming Language :: Python :: 3.14",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "pdf-page-images=pdf_page_images.cli.extract_images:main",
            "pdf-page-images-env=pdf_page_images.cli.docker:main",
        ],
    },
)
