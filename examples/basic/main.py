"""Basic example demonstrating url-composer.

Builds a few URLs from dynamic path patterns, tests them against the
same patterns and prints the parameter statistics.

Run with:
    python main.py
"""

import url_composer

API = "https://api.example.com/"
USER_ROUTE = "/users/:id(/posts/:post)"


def main() -> None:
    print(url_composer.build(host=API, path=USER_ROUTE, params={"id": 42, "post": 7}))
    print(url_composer.build(host=API, path=USER_ROUTE, params=[42], query={"tab": "posts"}))
    print(url_composer.build(host=API, path=USER_ROUTE))

    print(url_composer.test(path=USER_ROUTE, url="/users/42/posts/7"))
    print(url_composer.test(path=USER_ROUTE, url="/users/"))

    report = url_composer.stats(USER_ROUTE, [42])
    for param in report.params:
        state = "missing" if param in report.missing_params else "ok"
        kind = "optional" if param.optional else "required"
        print(f"{param.name:8} {kind:9} {state}")


if __name__ == "__main__":
    main()
