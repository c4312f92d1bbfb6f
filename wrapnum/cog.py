"""Discord extension exposing the brainfuck interpreter as a command"""
import asyncio
import functools
import multiprocessing

from discord.ext import commands

from wrapnum.bf import BFError, run_program

# Discord refuses longer messages
MESSAGE_LIMIT = 2000


def _set_result(future: asyncio.Future, result):
    if not future.done():
        future.set_result(result)


def _set_exception(future: asyncio.Future, exception: BaseException):
    if not future.done():
        future.set_exception(exception)


class BF(commands.Cog):

    MAXIMUM_PROCESSES = max(multiprocessing.cpu_count() // 2, 1)
    TIMEOUT = 10.0  # Timeout in seconds

    def __init__(self, bot: commands.Bot):
        self.bot = bot
        self.pool = multiprocessing.Pool(self.MAXIMUM_PROCESSES)

    def cog_unload(self):
        """Need to close the process pool"""
        self.pool.close()
        self.pool.terminate()

    async def run(self, program: str, input_: str = '') -> str:
        """Runs program in the process pool without blocking the event loop"""
        loop = asyncio.get_running_loop()
        future = loop.create_future()
        self.pool.apply_async(
            run_program,
            (program, input_, self.TIMEOUT),
            callback=functools.partial(loop.call_soon_threadsafe, _set_result, future),
            error_callback=functools.partial(loop.call_soon_threadsafe, _set_exception, future),
        )
        return await future

    @commands.command(name='bf', usage='<program> [input]', help='Runs a brainfuck program')
    async def bf(self, ctx: commands.Context, program: str, input_: str = ''):
        try:
            output = await self.run(program, input_)
        except BFError as e:
            await ctx.send(f'{ctx.author.mention} {e}')
            return
        await ctx.send(self.format_reply(ctx.author.mention, output))

    @staticmethod
    def format_reply(mention: str, output: str) -> str:
        reply = f'{mention} {output}'
        if len(reply) > MESSAGE_LIMIT:
            reply = reply[:MESSAGE_LIMIT - 3] + '...'
        return reply


async def setup(bot: commands.Bot) -> None:
    await bot.add_cog(BF(bot))
