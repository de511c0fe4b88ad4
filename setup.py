import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name='statusflow',
    version='0.1.0',
    packages=['statusflow'],
    description="Draw state transition flows with graphviz",
    long_description=long_description,
    long_description_content_type="text/markdown",
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
    python_requires='>=3.8',
)
