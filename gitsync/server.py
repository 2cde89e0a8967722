import asyncio
import json
import logging
from dataclasses import replace
from datetime import datetime
from pathlib import Path

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from .config import SyncConfig
from .git.clients import find_gui_client
from .git.workflow import GitSyncWorkflow
from .repo import find_repo_root

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


class GitSyncMCPServer:

    def __init__(self):
        self._server = Server("gitsync")
        self._register_handlers()

    def _register_handlers(self):
        self._server.list_tools()(self._list_tools)
        self._server.call_tool()(self._call_tool)

    async def _list_tools(self) -> list[Tool]:
        return [
            Tool(
                name="git_sync",
                description=(
                    "Update a git working copy without losing local edits: stash -u, "
                    "pull --rebase from the tracking upstream (or origin/<current branch>), "
                    "then stash pop. On conflicts the stash is re-applied, guidance is returned "
                    "and a local git client may be opened."
                ),
                inputSchema={
                    "type": "object",
                    "properties": {
                        "project_path": {
                            "type": "string",
                            "description": "Path inside the repository (the root is found by walking up to .git)"
                        },
                        "open_client": {
                            "type": "boolean",
                            "description": "Open a local git client on conflicts (default: from config)"
                        }
                    },
                    "required": ["project_path"]
                }
            ),
            Tool(
                name="find_git_client",
                description="Report which local graphical git client would be opened for conflicts.",
                inputSchema={
                    "type": "object",
                    "properties": {}
                }
            ),
            Tool(
                name="health_check",
                description="Check server health status.",
                inputSchema={
                    "type": "object",
                    "properties": {}
                }
            ),
        ]

    async def _call_tool(self, name: str, arguments: dict) -> list[TextContent]:
        if name == "git_sync":
            return await asyncio.to_thread(self._handle_git_sync, arguments)
        elif name == "find_git_client":
            return self._handle_find_git_client(arguments)
        elif name == "health_check":
            return self._handle_health_check(arguments)
        else:
            return [TextContent(type="text", text=f"Unknown tool: {name}")]

    def _handle_git_sync(self, arguments: dict) -> list[TextContent]:
        """Handle git_sync tool call."""
        project_path = Path(arguments["project_path"])
        if not project_path.exists():
            return [TextContent(type="text", text=f"Path does not exist: {project_path}")]

        repo_path = find_repo_root(project_path)
        config = SyncConfig.load(repo_path)
        if "open_client" in arguments:
            config = replace(config, open_gui_client=bool(arguments["open_client"]))

        logger.info(f"git_sync requested for {repo_path}")
        outcome = GitSyncWorkflow(repo_path, config).run()
        result = {"repo_path": str(repo_path), **outcome.to_dict()}
        return [TextContent(type="text", text=json.dumps(result, indent=2, ensure_ascii=False))]

    def _handle_find_git_client(self, arguments: dict) -> list[TextContent]:
        """Handle find_git_client tool call."""
        client = find_gui_client()
        if client is None:
            result = {"client": "git-gui", "executable_path": "git", "fallback": True}
        else:
            result = {"client": client.kind.value, "executable_path": client.executable_path, "fallback": False}
        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    def _handle_health_check(self, arguments: dict) -> list[TextContent]:
        """Returns server status."""
        result = {
            "status": "ok",
            "timestamp": datetime.now().isoformat(),
            "version": VERSION
        }
        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    async def run(self):
        async with stdio_server() as (read_stream, write_stream):
            await self._server.run(read_stream, write_stream, self._server.create_initialization_options())


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    server = GitSyncMCPServer()
    asyncio.run(server.run())


if __name__ == "__main__":
    main()
