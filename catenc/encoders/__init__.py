# Import all encoders so they register with the registry
from catenc.encoders.ordinal import OrdinalEncoder  # noqa: F401
from catenc.encoders.onehot import OneHotEncoder  # noqa: F401
from catenc.encoders.frequency import FrequencyEncoder, RollingFrequencyEncoder  # noqa: F401
from catenc.encoders.james_stein import (  # noqa: F401
    JamesSteinClassificationEncoder, JamesSteinRegressionEncoder,
)
