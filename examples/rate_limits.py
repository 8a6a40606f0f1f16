"""Throttle noisy events and queue calls to a rate-limited API.
"""
import asyncio

import decorum


registry = decorum.Decorators.default()


@decorum.decorated('throttle', .3, registry=registry)
def redraw(frame: int) -> None:
    print(f'redraw frame {frame}')


@decorum.decorated('queue', .2, immediate=True, registry=registry)
@decorum.decorated('strict_arguments', 'string', 'string', registry=registry)
def send_sms(phone: str, text: str) -> None:
    print(f'sms to {phone}: {text}')


async def main() -> None:
    for frame in range(10):
        redraw(frame)
        await asyncio.sleep(.1)
    for i in range(5):
        send_sms('+31000000000', f'message #{i}')
    await asyncio.sleep(1.2)


if __name__ == '__main__':
    asyncio.run(main())
