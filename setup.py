from setuptools import setup, find_packages

setup(
    name="party-photo-commons",
    version="1.0.0",
    description="Shared models, services and Lambda plumbing for the party photo backend",
    author="Party Photo Team",
    packages=find_packages(include=["party_photo_commons", "party_photo_commons.*"]),
    install_requires=[
        "boto3>=1.34.0",
        "python-dotenv>=1.0.0",
        "PyJWT>=2.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "moto[dynamodb,s3,ssm]>=5.0.0",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
