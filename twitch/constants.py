class Twitch:
    client_id = 'qabj6ffmjn431ca44gccoas72ywrs38'
    api_url = 'https://api.twitch.tv/helix'
    auth_url = 'https://id.twitch.tv'
    streams_path = '/streams'
    authorize_path = '/oauth2/authorize'
    redirect_port = 65010
    redirect_uri = 'https://127.0.0.1:{}'.format(redirect_port)
    channel_link = 'http://twitch.tv/{}'
    token_variable = 'TWITCH_API_TOKEN'
    config_prefix = 'twitch'
