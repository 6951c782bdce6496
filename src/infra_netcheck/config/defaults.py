"""默认值与固定取值集合"""

# VPC flow log 聚合间隔，顺序即错误消息中的列举顺序
FLOW_LOG_AGGREGATION_INTERVALS = (
    "INTERVAL_5_SEC",
    "INTERVAL_30_SEC",
    "INTERVAL_1_MIN",
    "INTERVAL_5_MIN",
    "INTERVAL_15_MIN",
)

FLOW_LOG_METADATA_VALUES = ("INCLUDE_ALL_METADATA",)

FLOW_LOG_SAMPLING_MIN = 0.0
FLOW_LOG_SAMPLING_MAX = 1.0

# 字段路径
NETWORKS_FIELD = "networks"

# CLI
OUTPUT_FORMATS = ("table", "json")
OUTPUT_DEFAULT_FORMAT = "table"
VERBOSE_DEFAULT = False
ENV_PREFIX = "NETCHECK_"
