from setuptools import setup, find_packages


def _requirements(path='requirements.txt'):
    with open(path) as f:
        return [l.strip() for l in f if l.strip() and not l.startswith('#')]


setup(
    name             = 'pagerbackup',
    version          = '0.3.0',
    description      = 'Record model for IPD handset backups: messages, contacts, memos, tasks, call logs',
    packages         = find_packages(exclude=['tests*']),
    install_requires = _requirements(),
    extras_require   = {
        'test': ['pytest>=7'],
    },
    python_requires  = '>=3.10',
    classifiers      = [
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
