from setuptools import find_packages, setup
import bip389
import io


with io.open("README.md", encoding="utf-8") as f:
    long_description = f.read()

with io.open("requirements.txt", encoding="utf-8") as f:
    requirements = [r for r in f.read().split('\n') if len(r)]

setup(name="bip389",
      version=bip389.__version__,
      description="Bitcoin Output Descriptor checksums and multipath notation (BIP380, BIP389)",
      long_description=long_description,
      long_description_content_type="text/markdown",
      license="MIT",
      packages=find_packages(exclude=["tests"]),
      keywords=["bitcoin", "descriptor", "multipath", "checksum"],
      install_requires=requirements,
      extras_require={"tests": ["pytest"]})
