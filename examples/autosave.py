"""Save the document only when the user stops typing.
"""
import asyncio
import logging

import decorum


logging.basicConfig(level=logging.DEBUG)


@decorum.decorated('debounce', .5)
@decorum.decorated('profile', 'storage')
async def save(text: str) -> None:
    await asyncio.sleep(.1)
    print(f'saved: {text!r}')


async def main() -> None:
    text = ''
    for char in 'hello world':
        text += char
        await save(text)
        await asyncio.sleep(.1)
    await asyncio.sleep(1)


if __name__ == '__main__':
    asyncio.run(main())
