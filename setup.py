from setuptools import setup, find_packages

setup(
    name="logpattern",
    version="0.1.0",
    description="Log format extraction from clusters of structurally similar logs",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["logpattern", "logpattern.*"]),
    include_package_data=True,
    install_requires=[
        "click>=8.0",
        "pandas>=1.0",
        "tqdm>=4.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        "Topic :: System :: Logging",
    ],
    keywords="logs, log templates, log patterns, clustering",
    python_requires=">=3.8",
)
