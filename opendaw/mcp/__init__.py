"""Remote-control commands, their channel, handlers and server."""