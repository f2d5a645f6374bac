import codecs
from setuptools import setup, find_packages

with open('statereducer/version.py') as f:
    exec(f.read())

with codecs.open('README.md', 'r', 'utf-8') as f:
    import re
    # cut the title and version line from the description
    regex = r"([\s\S]*)## Quickstart"
    readme = f.read()

    long_description = re.sub(regex, "## Quickstart", readme, 1)
    assert long_description[:13] == '## Quickstart'  # Description should start with a headline (## Quickstart)

tests_require = ['pytest', 'pycodestyle']
extras_require = {'test': tests_require, 'mypy': ['mypy']}

setup(
    name="statereducer",
    version=__version__,
    description="A minimal finite state machine helper with entry/exit hooks and event dispatch.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author='statereducer contributors',
    url='https://github.com/statereducer/statereducer',
    packages=find_packages(exclude=['tests', 'test_*', 'examples']),
    package_data={'statereducer': ['py.typed', '*.pyi']},
    include_package_data=True,
    install_requires=[],
    extras_require=extras_require,
    python_requires='>=3.8',
    license='MIT',
    download_url='https://github.com/statereducer/statereducer/archive/%s.tar.gz' % __version__,
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
