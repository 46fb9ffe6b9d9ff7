import os

# default configurations
os.environ.setdefault("TF_CPP_MIN_LOG_LEVEL", "1")

import tensorflow as tf  # pylint: disable=wrong-import-position


def as_dtype(dtype):
    """tensorflow dtype from a name such as ``"float64"`` or a numpy dtype"""
    if isinstance(dtype, tf.DType):
        return dtype
    return tf.as_dtype(dtype)


def is_tf_value(x):
    return tf.is_tensor(x) or isinstance(x, tf.Variable)
