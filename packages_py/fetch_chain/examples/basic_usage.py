"""
Basic usage of fetch_chain.

Expects an API on http://localhost:3000 serving /test.
"""
import asyncio
import logging

from fetch_chain import RequestBuilder, curried_fetch, set_base_url

logging.basicConfig(level=logging.DEBUG)


async def get_token():
    await asyncio.sleep(0)
    return {"Authorization": "Bearer demo-token"}


async def main():
    set_base_url("http://localhost:3000")

    # Relative path, joined to the base URL
    print("res 0", await RequestBuilder.GET("/test").run_json())

    # Full URLs skip the base URL
    print("res 1", await RequestBuilder.GET("http://localhost:3000/test").run_json())
    print("res 2", await RequestBuilder.GET("https://jsonplaceholder.typicode.com/todos/1").run_json())

    response = await (
        RequestBuilder.POST("/test")
        .header(lambda: {"randomHeader": True, "anotherHeader": "value"})
        .header(get_token)
        .header({"lastHeader": 1})
        .data({"test": True, "anotherTest": "testing"})
        .run()
    )
    print("res 3", response.status, await response.json())

    todos = curried_fetch("https://jsonplaceholder.typicode.com")("/todos/1")
    response = await todos(lambda: {"method": "GET"})()
    print("res 4", await response.json())


if __name__ == "__main__":
    asyncio.run(main())
