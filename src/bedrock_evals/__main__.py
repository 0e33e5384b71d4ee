"""bedrock-evals MCPサーバーのコマンドラインエントリポイント。"""

if __name__ == "__main__":
    import uvicorn

    from bedrock_evals.config import ServerConfig
    from bedrock_evals.log import configure_logging
    from bedrock_evals.server import create_server

    config = ServerConfig()
    configure_logging(config.log_level)
    mcp = create_server(config)
    app = mcp.http_app(transport="streamable-http")
    uvicorn.run(app, host=config.host, port=config.port)
