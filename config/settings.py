"""配置管理模块"""
import os
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# 加载环境变量
load_dotenv()

# 项目内置的字符数据文件
DEFAULT_CSV_FILE = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "hanzi_collate", "data", "chinese.csv"
)


class Settings(BaseSettings):
    """应用配置"""

    # 字符数据配置
    chinese_csv_file: str = os.getenv("CHINESE_CSV_FILE", DEFAULT_CSV_FILE)

    # 日志配置
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "output/logs/hanzi_collate.log")

    # 比较配置
    default_policy: str = os.getenv("DEFAULT_POLICY", "LEXICAL")  # 命令行默认比较策略

    class Config:
        env_file = ".env"
        case_sensitive = False


# 全局配置实例
settings = Settings()
