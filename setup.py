from setuptools import setup

setup(
    name="seximal",
    version="0.1.0",  # Match the version in seximal/__init__.py
    description="Seximal (base-6) fixed-width integer and floating point types",
    packages=["seximal"],
    package_data={"seximal": ["py.typed"]},
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
    zip_safe=False,
    python_requires=">=3.8",
)
