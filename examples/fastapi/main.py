"""FastAPI example demonstrating the url-composer request helpers.

Run with:
    uvicorn main:app --reload

Available endpoints:
    GET /users/{user_id}        - User with links built from path patterns
    GET /legacy/{rest:path}     - Only answers for /legacy/:id shaped URLs
"""

from fastapi import Depends, FastAPI, Request

from url_composer.fastapi import request_url, require_pattern

app = FastAPI(title="url-composer example")


@app.get("/users/{user_id}")
def get_user(user_id: int, request: Request):
    return {
        "id": user_id,
        "links": {
            "self": request_url(request, path="/users/:id", params=[user_id]),
            "posts": request_url(
                request, path="/users/:id/posts", params=[user_id], query={"page": 1}
            ),
        },
    }


@app.get("/legacy/{rest:path}", dependencies=[Depends(require_pattern("/legacy/:id"))])
def legacy(rest: str):
    return {"id": rest}
