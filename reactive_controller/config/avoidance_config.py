"""避障配置

固定阈值反射式避障策略的参数：
- 障碍物距离阈值
- 前进线速度
- 转向角速度
- 激光快照最小长度
"""

AVOIDANCE_CONFIG = {
    'obstacle_distance': 0.5,   # 障碍物距离阈值 (m)，读数严格小于此值视为阻挡
    'linear_speed': 0.2,        # 前方无障碍时的前进速度 (m/s)
    'angular_speed': 0.5,       # 单侧有障碍时的转向角速度 (rad/s)
    # 距离序列长度小于此值时跳过本周期
    # 默认 1: 只跳过空序列；N < 6 时左/右索引会与前方重合，但仍按原规则计算
    'min_ranges': 1,
}

# 避障配置验证规则
AVOIDANCE_VALIDATION_RULES = {
    'avoidance.obstacle_distance': (0.01, 100.0, '障碍物距离阈值 (m)'),
    'avoidance.linear_speed': (0.0, 10.0, '前进线速度 (m/s)'),
    'avoidance.angular_speed': (0.0, 10.0, '转向角速度 (rad/s)'),
    'avoidance.min_ranges': (1, 100000, '激光快照最小长度'),
}
