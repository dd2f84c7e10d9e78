from setuptools import find_packages, setup

setup(
    name="alist",
    version="0.1",
    packages=find_packages("src"),
    package_dir={"": "src"},
    license="MIT License",
    description="An association list with runtime-checked contracts",
    python_requires=">=3.9",
    install_requires=[
        "attrs>=22.2.0",
        "deal>=4.19",
        "immutables>=0.20",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
