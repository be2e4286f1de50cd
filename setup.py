""" Define the setup instructions for this package """
import os
import re
import setuptools


def version():
    """ Returns the version from s3url/__version__.py without importing the package """
    with open(os.path.join(os.path.dirname(__file__), "s3url", "__version__.py")) as f:
        return re.search(r"__version__\s*=\s*[\"']([^\"']+)[\"']", f.read()).group(1)


def long_description():
    """ Returns the README as the long descripion for this package """
    with open(os.path.join(os.path.dirname(__file__), "README.md")) as f:
        return "\n" + f.read()


def requirements():
    """ Returns the requirements.txt file as the install_requires for this package """
    with open(os.path.join(os.path.dirname(__file__), "requirements.txt")) as f:
        return [line.strip() for line in f if line.strip()]


setuptools.setup(
    name="s3url",
    version=version(),
    description="s3://bucket/key stream URLs on top of yarl",
    long_description=long_description(),
    long_description_content_type="text/markdown",
    python_requires=">=3.8.0",
    packages=setuptools.find_packages(exclude=["*.tests", "*.tests.*", "tests.*", "tests"]),
    install_requires=requirements(),
    extras_require={"test": ["pytest"]},
    license="MIT",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Software Development :: Libraries",
        "Typing :: Typed",
    ],
)
