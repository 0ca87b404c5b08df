from fastapi import APIRouter
from fastapi.responses import HTMLResponse
from html import escape

router = APIRouter()

ROUTES = [
    {"path": "/", "operation": "GET", "description": "Home page"},
    {"path": "/allUsers", "operation": "GET", "description": "Get all users"},
    {"path": "/users", "operation": "GET", "description": "Get paginated users"},
    {"path": "/users/:id", "operation": "GET", "description": "Get a user by ID"},
    {"path": "/addUser", "operation": "POST", "description": "Create a new user"},
    {"path": "/deleteUser/:id", "operation": "DELETE", "description": "Delete a user"},
    {"path": "/updateUser/:id", "operation": "PUT", "description": "Update a user"},
    {"path": "/addTeam", "operation": "POST", "description": "Create a new team"},
    {"path": "/allTeams", "operation": "GET", "description": "Get all teams"},
    {"path": "/deleteTeam/:id", "operation": "DELETE", "description": "Delete a team"},
    {"path": "/health", "operation": "GET", "description": "Service health"},
]

PAGE_TEMPLATE = """<html>
  <head>
    <title>API Directory</title>
    <style>
      body {{ font-family: Arial, sans-serif; margin: 0; padding: 0 20px; background-color: #f4f4f4; }}
      h1 {{ background-color: #333; color: #fff; padding: 10px; text-align: center; }}
      ul {{ list-style-type: none; padding: 0; }}
      li {{ background-color: #fff; padding: 10px; margin: 5px 0; border-radius: 5px;
           box-shadow: 0 2px 5px rgba(0, 0, 0, 0.1); }}
      li strong {{ color: #333; }}
    </style>
  </head>
  <body>
    <h1>API Directory</h1>
    <ul>
{items}
    </ul>
  </body>
</html>"""


def render_directory(routes=ROUTES) -> str:
    items = "\n".join(
        f"      <li><strong>{escape(r['path'])}</strong> - {r['operation']}: {escape(r['description'])}</li>"
        for r in routes
    )
    return PAGE_TEMPLATE.format(items=items)


@router.get("/", response_class=HTMLResponse)
async def directory():
    return render_directory()
