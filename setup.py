from setuptools import setup, find_packages


with open("multibag/version.py") as version_file:
    version = None
    for line in version_file.readlines():
        if "version = " in line:
            version = line.split(" = ")[1].replace("\"", "").strip()
            break
    else:
        print("Cannot determine version")

long_description = ''
try:
    with open("README.rst") as readme_file:
        long_description = readme_file.read()
except IOError:
    pass


required = []


extras = {
    'test': ["pytest", "hjson"],
}

extras['all'] = list({d for extra in extras.values() for d in extra})


setup(
    name='multibag',
    version=version,
    packages=find_packages(include=["multibag", "multibag.*"]),
    install_requires=required,
    extras_require=extras,
    zip_safe=False,
    keywords="multiset bag collection multiplicity",
    description="A multiset (bag) collection type",
    long_description=long_description,
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Topic :: Software Development :: Libraries',
        'Programming Language :: Python :: 3'],
)
