"""bucketsync: one-way directory to S3 bucket mirroring"""
__version__ = "1.0.0"
