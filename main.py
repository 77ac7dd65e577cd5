"""
Main entry point for the healing texts system.
Provides command-line interface for serving the API and rendering the catalog.
"""

import asyncio
import argparse
import sys
from typing import Optional

from utils import api_logger, main_logger, config_manager


class HealingSystem:
    """治愈系统主类"""

    def __init__(self):
        self.config = config_manager

    async def start_api_server(self, host: Optional[str] = None, port: Optional[int] = None):
        """启动API服务器"""
        import uvicorn
        from api.app import create_app

        api_config = self.config.get_api_config()

        # 命令行参数优先于 PORT 环境变量与配置文件
        final_host = host if host is not None else api_config.host
        final_port = port if port is not None else api_config.port

        api_logger.info(f"[Main] 治愈系图片系统运行在 http://localhost:{final_port}")

        config = uvicorn.Config(
            create_app(),
            host=final_host,
            port=final_port,
            log_level="info"
        )
        server = uvicorn.Server(config)
        await server.serve()

    async def render_catalog(self, base_url: Optional[str] = None, category: str = "all") -> str:
        """从运行中的服务获取目录并输出渲染结果"""
        from client import CatalogClient, Event, Renderer

        renderer = Renderer(CatalogClient(base_url))
        await renderer.start()
        renderer.send(Event("category_clicked", {"category": category}))

        view = renderer.view()
        main_logger.info(f"[Main] Rendered category '{category}'")
        return view["grid"]

    def show_categories(self):
        """显示目录中的分类"""
        from catalog import catalog_store
        from client import category_name

        print("分类列表:")
        for category in catalog_store.categories():
            count = len(catalog_store.filter_by_category(category))
            print(f"  {category:<12} {category_name(category):<4} ({count})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='治愈系图片系统',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
  python main.py serve --port 3000
  python main.py render --category wisdom
  python main.py categories
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='可用命令')

    serve_parser = subparsers.add_parser('serve', help='启动API服务器')
    serve_parser.add_argument('--host', default=None, help='监听地址 (默认读取配置)')
    serve_parser.add_argument('--port', type=int, default=None, help='监听端口 (默认: PORT 环境变量或 3000)')

    render_parser = subparsers.add_parser('render', help='获取并渲染卡片')
    render_parser.add_argument('--base-url', default=None, help='API地址 (默认读取配置)')
    render_parser.add_argument('--category', default='all', help='分类筛选 (默认: all)')

    subparsers.add_parser('categories', help='显示分类列表')

    return parser


async def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    system = HealingSystem()

    try:
        if args.command == 'serve':
            await system.start_api_server(host=args.host, port=args.port)

        elif args.command == 'render':
            print(await system.render_catalog(args.base_url, args.category))

        elif args.command == 'categories':
            system.show_categories()

        else:
            parser.print_help()

    except KeyboardInterrupt:
        main_logger.info("[Main] Received keyboard interrupt")
    except Exception as e:
        main_logger.error(f"[Main] System error: {e}")
        sys.exit(1)


def cli():
    asyncio.run(main())


if __name__ == "__main__":
    cli()
