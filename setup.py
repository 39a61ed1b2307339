from setuptools import setup, find_packages

setup(
    name="colebrook",
    version="0.1.0",
    author="Ildeberto de los Santos Ruiz",
    description="Darcy friction factor from the Colebrook-White equation",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
        "scipy>=1.7.0",
        "pandas>=1.3.0",
        "matplotlib>=3.4.0",
        "tqdm>=4.62.0",
        "PyYAML>=5.4",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
