"""系统基础配置

包含控制器的基础系统参数：
- 控制频率
- 诊断与日志配置
"""

# 系统配置
# 参考节拍为 50ms 一个控制周期，即 20Hz
SYSTEM_CONFIG = {
    'ctrl_freq': 20,              # 控制频率 (Hz)
}

# 诊断配置
DIAGNOSTICS_CONFIG = {
    'log_readings': True,         # 每个周期以 DEBUG 级别记录三方向读数
    'warn_throttle_sec': 5.0,     # 数据异常警告的最小间隔 (秒)
}

# 系统配置验证规则
SYSTEM_VALIDATION_RULES = {
    'system.ctrl_freq': (1, 1000, '控制频率 (Hz)'),
    'diagnostics.warn_throttle_sec': (0.0, 3600.0, '警告节流间隔 (秒)'),
}
