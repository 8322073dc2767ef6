"""Load and performance tests.

Focus on throughput and latency of the contact lookup endpoints under
realistic load. Run with ``locust -f tests/load/locustfile.py``.
"""
