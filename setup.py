from setuptools import setup, find_packages

setup(
    name="guidepath",
    version="1.0.0",
    description="Guide-node Bezier paths with arc-length sampling and a pygame preview",
    packages=find_packages(include=["guidepath", "guidepath.*"]),
    py_modules=["main", "doctor"],
    include_package_data=True,
    package_data={"": ["*.json"]},
    install_requires=[
        "pygame>=2.1.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    python_requires=">=3.8",
)
