from pathlib import Path


# 获取项目根目录
BASE_DIR = Path(__file__).resolve().parents[1]

# 常用子目录路径
CONFIG_DIR = BASE_DIR / 'config'
LOG_DIR = BASE_DIR / 'log'
PUBLIC_DIR = BASE_DIR / 'public'

# 静态资源子目录（相对于静态根目录）
PUBLIC_SUBDIRS = ('images', 'css', 'js')


def ensure_directories(root: Path, subdirs=PUBLIC_SUBDIRS) -> list:
    """确保静态根目录及其子目录存在，返回本次新建的目录列表"""
    created = []
    for directory in [Path(root)] + [Path(root) / sub for sub in subdirs]:
        if not directory.exists():
            directory.mkdir(parents=True, exist_ok=True)
            created.append(directory)
    return created


if __name__ == "__main__":
    print("BASE_DIR:", BASE_DIR)
    print("CONFIG_DIR:", CONFIG_DIR)
    print("LOG_DIR:", LOG_DIR)
    print("PUBLIC_DIR:", PUBLIC_DIR)
