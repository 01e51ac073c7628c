import re
from setuptools import setup


with open('rdio_auth/__init__.py') as init:
    __version__ = re.search(r"__version__ = '([^']+)'", init.read()).group(1)

try:
    with open('README.rst') as readme:
        README = readme.read()
except IOError:
    README = ''

setup(
    name='rdio_auth',
    version=__version__,
    packages=['rdio_auth'],
    install_requires=['requests', 'requests_oauthlib', 'oauthlib', 'click'],
    extras_require={'test': ['pytest']},
    author='Dirley Rodrigues',
    author_email='dirleyrls@gmail.com',
    description='Log users in with their Rdio account over OAuth 2.0',
    long_description=README,
    license='MIT',
    python_requires='>=3.6',
    entry_points={
        'console_scripts': ['rdio-auth = rdio_auth.cli:main'],
    },
)
