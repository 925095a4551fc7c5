"""发件人统计领域模块

该模块包含收件箱发件人统计的领域模型，包括：
- MessageRef / MessagePage 等值对象
- SenderAddress 发件人地址值对象与地址提取
- SenderTally 线程安全计数器
- MailClient 邮件客户端接口
"""
