"""
Load headlines and messages the way the sandbox app does on start-up.
"""
import asyncio
import logging

from endpoint_fetch import HEADLINES, MESSAGES, FetchError, NetworkManager, testing


async def main():
    async with testing() as environment:
        manager = NetworkManager.create(environment)
        try:
            headlines = await manager.fetch(HEADLINES)
            messages = await manager.fetch_with_retry(MESSAGES, attempts=3, retry_delay=1)
        except FetchError as e:
            print(f"Could not load data: {e}")
            return

    print("Headlines")
    for headline in headlines:
        print(f"  {headline.title}: {headline.strap}")

    print("Messages")
    for message in messages:
        print(f"  {message.sender}: {message.text}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
