from setuptools import setup, find_packages

setup(
    name='ottrace-propagator',
    version='1.0.0',
    description='ot-trace HTTP header propagation for OpenTelemetry and OpenTracing',
    long_description='',
    author='ottrace-propagator contributors',
    license='Apache-2.0',
    python_requires='>=3.8',
    install_requires=[
        'opentelemetry-api>=1.12,<2.0',
        'opentracing>=2.0,<3',
        'basictracer>=3.0,<4',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    classifiers=[
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
    ],

    keywords=[
        'opentelemetry',
        'opentracing',
        'propagation',
        'tracing',
        'microservices',
        'distributed'
    ],
    packages=find_packages(exclude=['docs*', 'tests*', 'examples*']),
    entry_points={
        'opentelemetry_propagator': [
            'ottrace = ottrace.propagator:OTTracePropagator',
        ],
    },
)
