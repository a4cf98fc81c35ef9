from setuptools import setup, find_packages

setup(
    name='shorturl',
    version = '0.1.dev0',
    author = 'Tech Residents, Inc.',
    packages = find_packages(exclude=['tests']),
    python_requires = '>=3.6',
    license = 'MIT',
    description = 'Reversible short URL identifier encoder',
    long_description = open('README').read(),
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries :: Python Modules',
        ],
)
