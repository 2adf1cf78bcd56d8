"""
Monitoring module for logger metrics

Example:
    from scoped_logger import LoggerBuilder
    from scoped_logger.monitoring import MetricsCollector

    logger = LoggerBuilder().with_console().build()
    collector = MetricsCollector().attach(logger)

    logger.info("hello")
    print(collector.get_metrics().to_dict())
"""

from scoped_logger.monitoring.metrics import LoggerMetrics, MetricsCollector

__all__ = [
    "LoggerMetrics",
    "MetricsCollector",
]
